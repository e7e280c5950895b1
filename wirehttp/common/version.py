# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
VERSION = (0, 1, 0)
__version__ = '.'.join(map(str, VERSION[0:3]))


__all__ = '__version__', 'VERSION'
