# conftest.py
import sys
import os

# Put the project root on the path so tests can import 'src.<module>'
# (src modules use relative imports, so they must load as the 'src' package)
project_root = os.path.abspath(os.path.dirname(__file__))
if project_root not in sys.path:
    sys.path.insert(0, project_root)
