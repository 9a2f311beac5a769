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

"""Value types shared across bannerkit.

This module imports nothing from other ``bannerkit`` modules except
:mod:`bannerkit.errors`, so it is safe to import from anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass

from bannerkit.errors import OptionError

__all__ = [
    'DEFAULT_MARKER',
    'DEFAULT_PAD',
    'DEFAULT_RANK',
    'DEFAULT_WIDTH',
    'Banner',
    'BannerParameters',
]

DEFAULT_WIDTH = 80
DEFAULT_RANK = 2
DEFAULT_PAD = 1
DEFAULT_MARKER = '%'


@dataclass(frozen=True)
class BannerParameters:
    """Layout settings for one banner.

    Attributes:
        width: Length of every output line. Must be positive.
        rank: Number of blank bordered lines above and below the title.
        pad: Number of fully filled lines at the very top and bottom.
        marker: Single character used for borders and fill lines.

    Raises:
        OptionError: If any field is out of range.
    """

    width: int = DEFAULT_WIDTH
    rank: int = DEFAULT_RANK
    pad: int = DEFAULT_PAD
    marker: str = DEFAULT_MARKER

    def __post_init__(self) -> None:
        """Validate field ranges."""
        if self.width < 1:
            raise OptionError(f'width must be a positive integer, got {self.width}')
        if self.rank < 0:
            raise OptionError(f'rank must be a non-negative integer, got {self.rank}')
        if self.pad < 0:
            raise OptionError(f'pad must be a non-negative integer, got {self.pad}')
        if len(self.marker) != 1:
            raise OptionError(f'marker must be exactly one character, got {self.marker!r}')


@dataclass(frozen=True)
class Banner:
    """A finished banner.

    Attributes:
        lines: Output lines in order, without newline terminators.
        params: The parameters the banner was built with.
    """

    lines: tuple[str, ...]
    params: BannerParameters

    def render(self) -> str:
        """Return the banner text with every line newline-terminated."""
        return ''.join(f'{line}\n' for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)
