"""
Import externalization rules.

Only bare specifiers such as ``react`` or ``lodash/fp`` are left to the
runtime; relative, absolute, URL-like, virtual and HTML ids are bundled.
The same patterns drive the Python predicate and the JavaScript function
written into the Vite config.
"""

import json
import re

# Rollup marks plugin-internal modules with a leading NUL byte
VIRTUAL_PREFIX = "\0"

HTML_ID_PATTERN = r'\.html?$'
WINDOWS_ABSOLUTE_PATTERN = r'^[A-Za-z]:[\\/]'
URL_PATTERN = r'^[a-zA-Z][a-zA-Z\d+\-.]*:'  # http:, https:, data:, node:, ...

RELATIVE_PREFIXES = ("./", "../")
POSIX_ABSOLUTE_PREFIX = "/"

_html_id = re.compile(HTML_ID_PATTERN, re.IGNORECASE)
_windows_absolute = re.compile(WINDOWS_ABSOLUTE_PATTERN)
_url = re.compile(URL_PATTERN)


def is_bare_specifier(specifier: str) -> bool:
    """
    Check whether a module id is a bare package specifier.

    Args:
        specifier: Module id as seen by the bundler

    Returns:
        True for package-style ids, False for anything path- or URL-like
    """
    if specifier.startswith(VIRTUAL_PREFIX) or _html_id.search(specifier):
        return False

    is_relative = specifier.startswith(RELATIVE_PREFIXES)
    is_posix_absolute = specifier.startswith(POSIX_ABSOLUTE_PREFIX)
    is_windows_absolute = bool(_windows_absolute.match(specifier))
    is_url = bool(_url.match(specifier))

    return not (is_relative or is_posix_absolute or is_windows_absolute or is_url)


def is_external(specifier: str, externalize_bare_imports: bool = True) -> bool:
    """
    Decide whether the bundler should leave an import unbundled.

    Args:
        specifier: Module id
        externalize_bare_imports: Config switch; nothing is external when off

    Returns:
        True if the import is left for the runtime to resolve
    """
    if not externalize_bare_imports:
        return False
    return is_bare_specifier(specifier)


def render_external_js() -> str:
    """
    Render the predicate as a JavaScript arrow function for Rollup's
    ``external`` option.
    """
    return (
        "(id) => {\n"
        f"  if (id.startsWith({json.dumps(VIRTUAL_PREFIX)}) || "
        f"new RegExp({json.dumps(HTML_ID_PATTERN)}, \"i\").test(id)) return false;\n"
        f"  const isRelative = {' || '.join(f'id.startsWith({json.dumps(p)})' for p in RELATIVE_PREFIXES)};\n"
        f"  const isAbsPosix = id.startsWith({json.dumps(POSIX_ABSOLUTE_PREFIX)});\n"
        f"  const isAbsWin = new RegExp({json.dumps(WINDOWS_ABSOLUTE_PATTERN)}).test(id);\n"
        f"  const isUrl = new RegExp({json.dumps(URL_PATTERN)}).test(id);\n"
        "  return !(isRelative || isAbsPosix || isAbsWin || isUrl);\n"
        "}"
    )
