"""CLI commands, one module each.

Every .py file in this package that defines a `command` object is
auto-registered by webcolor.registry.discover().

The explicit imports below make PyInstaller bundle these modules; without
them pkgutil.iter_modules cannot see them in a frozen binary.
"""

import webcolor.commands.alpha as _alpha  # noqa: F401
import webcolor.commands.contrast as _contrast  # noqa: F401
import webcolor.commands.contrasting as _contrasting  # noqa: F401
import webcolor.commands.info as _info  # noqa: F401
import webcolor.commands.invert as _invert  # noqa: F401
import webcolor.commands.sample as _sample  # noqa: F401
import webcolor.commands.shade as _shade  # noqa: F401
import webcolor.commands.swatch as _swatch  # noqa: F401
