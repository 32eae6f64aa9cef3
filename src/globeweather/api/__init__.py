# SPDX-License-Identifier: Apache-2.0
"""HTTP surface: proxy endpoints and the bundled browser UI."""
