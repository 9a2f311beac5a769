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

"""bannerkit: letter-spaced comment banners for document sections."""

from __future__ import annotations

from bannerkit._types import Banner, BannerParameters
from bannerkit.errors import BannerKitError, FitError, OptionError
from bannerkit.formatter import format_banner, normalize_title

__version__ = '0.1.0'

__all__ = [
    'Banner',
    'BannerKitError',
    'BannerParameters',
    'FitError',
    'OptionError',
    '__version__',
    'format_banner',
    'normalize_title',
]
