"""
Only the root tests/ directory carries an __init__.py; test subdirectories are
namespace packages (PEP 420) so pytest imports them with consistent module names.
"""
