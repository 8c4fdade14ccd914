# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from errtree._version import __version__
from errtree.compat import ErrorTreeError, ErrorWrapper, ExceptionGroupTree
from errtree.display import DisplayKind, SourceDisplay, TreeDisplay, display_tree, render, render_source
from errtree.errors import DecodeError, ErrTreeError
from errtree.mishap import Mishap, wrap_error, wrap_error_tree, wrap_errors
from errtree.serde import SerdeErrorTree, deserialize, serialize
from errtree.tree import ErrorTree, Source, SourceKind, TreeRef, error_cause, iter_error_chain

__all__ = [
    '__version__',
    'DecodeError',
    'DisplayKind',
    'ErrTreeError',
    'ErrorTree',
    'ErrorTreeError',
    'ErrorWrapper',
    'ExceptionGroupTree',
    'Mishap',
    'SerdeErrorTree',
    'Source',
    'SourceDisplay',
    'SourceKind',
    'TreeDisplay',
    'TreeRef',
    'deserialize',
    'display_tree',
    'error_cause',
    'iter_error_chain',
    'render',
    'render_source',
    'serialize',
    'wrap_error',
    'wrap_error_tree',
    'wrap_errors',
]
