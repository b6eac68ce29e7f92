# SPDX-License-Identifier: MIT
"""Interface modules aggregating protocols for fdo_util subsystems.

Import the specific interface modules (e.g. ``fdo_util.interfaces.config``)
directly instead of relying on re-exports.
"""

__all__: tuple[str, ...] = ()
