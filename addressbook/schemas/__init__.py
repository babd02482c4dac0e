"""
Address book schema definitions

Any schema has a base name and any of the following extended names:
 * ``Creation`` to create a new instance of that schema
 * ``Update`` to replace an existing instance of that schema
For example, there are three classes to represent people:
``Person``, ``PersonCreation`` and ``PersonUpdate``

An update always replaces the whole resource. There are no
patches, so any field missing in an update is an error.

This package also contains the ``config`` module, but it's not
exported by default, since it's currently only used internally.
"""

from .bases import *
from .errors import *
