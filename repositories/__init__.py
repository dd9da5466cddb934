"""
repositories/ - Data Access Layer
==================================
`UserRepository` defines the CRUD capability set; each storage technology
provides one implementation that holds all SQL for the users table.
Repositories receive raw rows from the database and return User objects.
"""
