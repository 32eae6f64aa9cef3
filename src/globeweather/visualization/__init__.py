# SPDX-License-Identifier: Apache-2.0
"""Browser bundle generation for the interactive globe."""
