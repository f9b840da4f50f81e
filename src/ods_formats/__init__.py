"""Render spreadsheet values with OpenDocument value formats."""

from ods_formats._version import __version__
from ods_formats.attrmap import *  # noqa: F403
from ods_formats.builders import *  # noqa: F403
from ods_formats.constants import *  # noqa: F403
from ods_formats.detach import *  # noqa: F403
from ods_formats.exceptions import *  # noqa: F403
from ods_formats.format import *  # noqa: F403
from ods_formats.style import *  # noqa: F403


def _get_version() -> str:
    return __version__
