# SPDX-License-Identifier: Apache-2.0
"""SiteGlobe: project sites from a published spreadsheet on a CesiumJS globe."""

__version__ = "0.1.0"
