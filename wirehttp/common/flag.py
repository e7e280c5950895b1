# -*- coding: utf-8 -*-
"""
    wirehttp
    ~~~~~~~~
    Shared HTTP wire-level primitives for client and server implementations:
    headers, header line parsing, status codes, methods & protocol versions.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import sys
import argparse

from typing import Optional, List, Any, cast

from .logger import Logger
from .constants import COMMA, DEFAULT_ALLOWED_METHODS, DEFAULT_MAX_HEADER_BYTES
from .version import __version__

__homepage__ = 'https://github.com/abhinavsingh/proxy.py'


class FlagParser:
    """Wrapper around argparse module.

    Import `flag.flags` and use `add_argument` API
    to define custom flags within respective Python files.

    Flags must be registered at module level.  Registering the
    same flag twice, e.g. from a class ``__init__`` that runs
    more than once, raises :exc:`argparse.ArgumentError`.
    """

    def __init__(self) -> None:
        self.args: Optional[argparse.Namespace] = None
        self.actions: List[str] = []
        self.parser = argparse.ArgumentParser(
            description='wirehttp v%s' % __version__,
            epilog='wirehttp not working? Report at: %s/issues/new' % __homepage__,
        )

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        """Register a flag."""
        action = self.parser.add_argument(*args, **kwargs)
        self.actions.append(action.dest)
        return action

    def parse_args(
            self, input_args: Optional[List[str]],
    ) -> argparse.Namespace:
        """Parse flags from input arguments."""
        self.args = self.parser.parse_args(input_args)
        return self.args

    @staticmethod
    def initialize(
        input_args: Optional[List[str]] = None,
        **opts: Any,
    ) -> argparse.Namespace:
        """Parses flags, prints version if requested, sets up logging
        and resolves final values.  Keyword ``opts`` take precedence
        over parsed input arguments."""
        if input_args is None:
            input_args = []

        args = flags.parse_args(input_args)

        # Print version and exit
        if args.version:
            print(__version__)
            sys.exit(0)

        try:
            Logger.setup(
                opts.get('log_file', args.log_file),
                opts.get('log_level', args.log_level),
                opts.get('log_format', args.log_format),
            )
        except ValueError as e:
            # Exits with status 2 and usage, as for any other bad flag
            flags.parser.error(str(e))

        args.max_header_bytes = cast(
            int,
            opts.get(
                'max_header_bytes',
                args.max_header_bytes,
            ),
        )
        if args.max_header_bytes <= 0:
            args.max_header_bytes = DEFAULT_MAX_HEADER_BYTES
        args.input = cast(Optional[str], opts.get('input', args.input))
        args.status = cast(Optional[int], opts.get('status', args.status))
        args.method = cast(Optional[str], opts.get('method', args.method))
        allowed_methods = opts.get('allowed_methods', args.allowed_methods)
        if isinstance(allowed_methods, str):
            allowed_methods = [
                m.strip()
                for m in allowed_methods.split(COMMA)
                if m.strip() != ''
            ]
        args.allowed_methods = cast(
            List[str],
            allowed_methods if allowed_methods is not None
            else DEFAULT_ALLOWED_METHODS.split(COMMA),
        )
        return args


flags = FlagParser()
