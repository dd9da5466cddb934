"""
services/ - Application Layer
=============================
Use-case facades over the repositories. Services add no business rules and
let repository errors propagate unchanged.
"""
