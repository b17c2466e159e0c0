# gridpath/__init__.py
