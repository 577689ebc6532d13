"""giveup — end a command-line program with a helpful message, not a traceback.

Attach a hint and an example to a failing result, then give up::

    from giveup import attempt

    config = (
        attempt(read_config, path)
        .with_hint("Create a configuration file")
        .with_example("touch config-filename")
        .giveup("Missing configuration file")
    )
"""

import logging

from giveup.cli.boundary import giving_up, terminate
from giveup.core.annotated import Annotated, annotate
from giveup.core.models import FailureReport
from giveup.core.result import Err, Ok, Result, attempt
from giveup.exceptions import GiveupError, InvalidAnnotationError, NotAResultError
from giveup.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "Annotated",
    "Err",
    "FailureReport",
    "GiveupError",
    "InvalidAnnotationError",
    "NotAResultError",
    "Ok",
    "Result",
    "__version__",
    "annotate",
    "attempt",
    "giving_up",
    "terminate",
]
