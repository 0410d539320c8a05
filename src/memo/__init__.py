"""Keeps short plain-text memos in ``~/.memo``.

If you installed via ``pip``, run ``note -h`` to get help.
Or, run ``python3 -m memo -h``.

To use the Python API, look at :class:`memo.api.Memos`
"""

__version__ = '0.1.0'
