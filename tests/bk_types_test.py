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

"""Tests for bannerkit._types module."""

from __future__ import annotations

import dataclasses

import pytest
from bannerkit._types import (
    DEFAULT_MARKER,
    DEFAULT_PAD,
    DEFAULT_RANK,
    DEFAULT_WIDTH,
    Banner,
    BannerParameters,
)
from bannerkit.errors import BannerKitError, FitError, OptionError


class TestBannerParameters:
    """Tests for BannerParameters defaults and validation."""

    def test_defaults(self) -> None:
        """Defaults are width 80, rank 2, pad 1, marker %."""
        params = BannerParameters()
        assert params.width == DEFAULT_WIDTH == 80
        assert params.rank == DEFAULT_RANK == 2
        assert params.pad == DEFAULT_PAD == 1
        assert params.marker == DEFAULT_MARKER == '%'

    def test_frozen(self) -> None:
        """Parameters cannot be mutated after construction."""
        params = BannerParameters()
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.width = 40  # type: ignore[misc]

    def test_zero_rank_and_pad_allowed(self) -> None:
        """Zero rank and pad are valid."""
        params = BannerParameters(rank=0, pad=0)
        assert params.rank == 0
        assert params.pad == 0

    def test_rejects_non_positive_width(self) -> None:
        """Width must be at least 1."""
        with pytest.raises(OptionError, match='width must be a positive integer'):
            BannerParameters(width=0)

    def test_rejects_negative_rank(self) -> None:
        """Rank must not be negative."""
        with pytest.raises(OptionError, match='rank must be a non-negative integer'):
            BannerParameters(rank=-1)

    def test_rejects_negative_pad(self) -> None:
        """Pad must not be negative."""
        with pytest.raises(OptionError, match='pad must be a non-negative integer'):
            BannerParameters(pad=-3)

    def test_rejects_multi_char_marker(self) -> None:
        """Marker must be exactly one character."""
        with pytest.raises(OptionError, match='exactly one character'):
            BannerParameters(marker='%%')

    def test_rejects_empty_marker(self) -> None:
        """An empty marker is rejected."""
        with pytest.raises(OptionError, match='exactly one character'):
            BannerParameters(marker='')


class TestBanner:
    """Tests for the Banner value type."""

    def test_render_terminates_every_line(self) -> None:
        """render() puts a newline after each line, including the last."""
        banner = Banner(lines=('%%%', '%x%', '%%%'), params=BannerParameters(width=3))
        assert banner.render() == '%%%\n%x%\n%%%\n'

    def test_len_counts_lines(self) -> None:
        """len() is the number of lines."""
        banner = Banner(lines=('a', 'b'), params=BannerParameters(width=1))
        assert len(banner) == 2


class TestErrors:
    """Tests for the error hierarchy."""

    def test_hierarchy(self) -> None:
        """Both error kinds derive from BannerKitError."""
        assert issubclass(OptionError, BannerKitError)
        assert issubclass(FitError, BannerKitError)

    def test_exit_codes(self) -> None:
        """Option errors exit 2, fit errors exit 1."""
        assert OptionError('x').exit_code == 2
        assert FitError('x').exit_code == 1

    def test_hint_defaults_empty(self) -> None:
        """Hint is empty unless given."""
        assert OptionError('x').hint == ''
        assert FitError('x', hint='wider').hint == 'wider'
