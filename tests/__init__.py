"""
This __init__.py file is kept in the root tests directory only.

Test subdirectories work as namespace packages (PEP 420) without their own
__init__.py, so keep test module names unique across the tree.
"""
