# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Error types raised by bannerkit.

Both error kinds are fatal. The CLI maps each one to its own exit
code and prints the message (plus an optional hint) to stderr.
"""

from __future__ import annotations

__all__ = [
    'BannerKitError',
    'FitError',
    'OptionError',
]


class BannerKitError(Exception):
    """Base class for all bannerkit errors.

    Attributes:
        hint: Optional follow-up advice shown below the message.
        exit_code: Process exit status the CLI uses for this error.
    """

    exit_code: int = 1

    def __init__(self, message: str, *, hint: str = '') -> None:
        """Initialize with a message and an optional hint."""
        super().__init__(message)
        self.hint = hint


class OptionError(BannerKitError):
    """An unrecognized, malformed or out-of-range command-line option."""

    exit_code = 2


class FitError(BannerKitError):
    """The spaced title does not fit inside the requested width."""

    exit_code = 1
