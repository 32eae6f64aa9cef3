# SPDX-License-Identifier: Apache-2.0
"""Connectors for the external weather and AI completion providers."""
