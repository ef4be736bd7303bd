"""wxPython presentation layer for the playbook browser."""
