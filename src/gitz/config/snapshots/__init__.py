"""
Frozen schema snapshots of historical git-z configuration versions.

Each module describes exactly what one released or development version of
git-z wrote. These models are never changed: a new requirement means a new
snapshot and a new forward conversion.
"""

from . import v0_1, v0_2_dev_0, v0_2_dev_1, v0_2_dev_2, v0_2_dev_3

__all__ = ["v0_1", "v0_2_dev_0", "v0_2_dev_1", "v0_2_dev_2", "v0_2_dev_3"]
