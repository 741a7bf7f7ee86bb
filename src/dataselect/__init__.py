"""
dataselect – generic resource selection pipeline.

Import path convention::

    from dataselect.selection import QueryDescriptor, QueryExecutor
    from dataselect.resources.kubernetes import SecretService, to_secret_list
    from dataselect.entities import find_list_page
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
