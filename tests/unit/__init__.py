"""
PySATL Moments
==============

Unit tests for numerics, moment extraction, density sampling and
parametric families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
