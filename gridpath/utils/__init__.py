# gridpath/utils/__init__.py
