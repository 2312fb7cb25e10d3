# SPDX-License-Identifier: MIT
"""
Qt user interface components for the zoo demo.
"""

from .main_window import MainWindow  # noqa: F401
from .zoo_view import AnimalDetailView, SkyIconWidget, ZooView  # noqa: F401
