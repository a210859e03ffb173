# __init__.py
__version__ = "0.1.0"
