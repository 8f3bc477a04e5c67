# SPDX-License-Identifier: MIT

from typing import Union

Snowflake = Union[str, int]
