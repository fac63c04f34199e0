# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Hashing exceptions."""


class HashEncodingError(RuntimeError):
    """A password or salt could not be encoded to bytes."""


__all__ = ["HashEncodingError"]
