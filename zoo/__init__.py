# SPDX-License-Identifier: MIT
"""
Zoo demo: a racoon and a parrot that fall asleep and wake up as day turns to
night every few seconds, shown in a Qt window.

`zoo.core` holds the day/night clock and its configuration, `zoo.ui` the
widgets that draw it, and `zoo.main` starts the application.
"""

__all__ = ["main"]
