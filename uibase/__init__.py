"""UI-base standards tooling.

Two command-line tools share this package:

    uibase-setup [target]      -- apply the standards bundle to an existing project
    uibase-create <name>       -- scaffold a new React + TypeScript project

Both are thin ``argparse`` front-ends over :class:`StandardsSetup` and
:class:`ProjectCreator`, which drive an ordered list of named steps (see
:mod:`uibase.pipeline`).
"""

__version__ = "0.1.0"
