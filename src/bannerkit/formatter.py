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

"""Banner formatting: normalize, center and assemble.

Turns a title into a boxed, letter-spaced banner::

    %%%%%%%%%%%%%%%%%%%%%
    %                   %
    %                   %
    %   T H E   E N D   %
    %                   %
    %                   %
    %%%%%%%%%%%%%%%%%%%%%

Pipeline::

    title ──► normalize_title ──► center_title ──► build_banner ──► Banner
              (upper, tabs,       (fit check,      (pad + rank
               letter-space)       margins)         lines)

Every line of the result is exactly ``width`` characters long.
"""

from __future__ import annotations

from bannerkit._types import Banner, BannerParameters
from bannerkit.errors import FitError
from bannerkit.logging import get_logger

logger = get_logger(__name__)

# Tabs are substituted literally, not aligned to tab stops.
TAB_WIDTH = 8

__all__ = [
    'TAB_WIDTH',
    'build_banner',
    'center_title',
    'format_banner',
    'normalize_title',
]


def normalize_title(title: str) -> str:
    """Return the spaced form of ``title``.

    Uppercases, expands each tab to :data:`TAB_WIDTH` spaces, puts a
    space after every character and strips trailing whitespace, so
    ``'the end'`` becomes ``'T H E   E N D'``.
    """
    text = title.upper().replace('\t', ' ' * TAB_WIDTH)
    spaced = ''.join(f'{ch} ' for ch in text).rstrip()
    logger.debug('normalized title', title=title, spaced=spaced, length=len(spaced))
    return spaced


def center_title(spaced: str, width: int, marker: str = '%') -> str:
    """Build the bordered title line for an already spaced title.

    The odd leftover column, if any, goes to the left margin.

    Args:
        spaced: Output of :func:`normalize_title`.
        width: Total line width, borders included.
        marker: Border character.

    Returns:
        A line of exactly ``width`` characters.

    Raises:
        FitError: If the title plus two borders exceeds ``width``.
    """
    extra = width - len(spaced)
    # Floor division: a one-column overflow must give -1, not 0.
    side = (extra - 2) // 2
    if side < 0:
        raise FitError(
            f'title does not fit in width {width}',
            hint=f'The spaced title needs a width of at least {len(spaced) + 2}.',
        )
    left = side + extra % 2
    line = f'{marker}{" " * left}{spaced}{" " * side}{marker}'
    logger.debug('centered title', width=width, left=left, right=side)
    return line


def build_banner(title_line: str, params: BannerParameters) -> Banner:
    """Surround a centered title line with rank and pad lines."""
    fill = params.marker * params.width
    blank = f'{params.marker}{" " * (params.width - 2)}{params.marker}'
    lines = (
        [fill] * params.pad
        + [blank] * params.rank
        + [title_line]
        + [blank] * params.rank
        + [fill] * params.pad
    )
    logger.debug('assembled banner', lines=len(lines), width=params.width)
    return Banner(lines=tuple(lines), params=params)


def format_banner(title: str, params: BannerParameters | None = None) -> Banner:
    """Format ``title`` into a complete banner.

    Args:
        title: Raw title text.
        params: Layout settings. Defaults to :class:`BannerParameters`
            defaults (width 80, rank 2, pad 1, marker ``%``).

    Returns:
        The finished :class:`Banner`.

    Raises:
        FitError: If the title does not fit in ``params.width``.
    """
    params = params or BannerParameters()
    spaced = normalize_title(title)
    title_line = center_title(spaced, params.width, params.marker)
    return build_banner(title_line, params)
