"""Shared markdown fixtures for unit tests"""

import pytest


MIXED_MD = """\
# Title

Intro paragraph spanning
multiple lines.

- First
- Second
1. One
2. Two
"""

HELP_MD = """\
## CPU

The usage formula is $usage = (Δuser + Δsystem + Δnice) / Δtotal$.

Peak core: $i_peak = arg max_i (usage_i)$

Appearance follows Light / Dark. Sampling uses host_processor_info.

```swift
let x = 1
```
"""


@pytest.fixture(name="mixed_md")
def mixed_md_fixture():
    return MIXED_MD


@pytest.fixture(name="help_md")
def help_md_fixture():
    return HELP_MD
