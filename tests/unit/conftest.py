"""Default marks for tests under `tests/unit/`.

Every item collected here is marked `unit`; hypothesis-driven items are also
marked `property`, so ``-m "not property"`` gives a quick example-based run.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()


def _is_hypothesis_test(item: pytest.Item) -> bool:
    func = getattr(item, "function", None)
    return bool(getattr(func, "is_hypothesis_test", False))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add `unit` (and, for hypothesis tests, `property`) marks."""
    for item in items:
        if UNIT_ROOT not in item.path.resolve().parents:
            continue
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
        if _is_hypothesis_test(item) and item.get_closest_marker("property") is None:
            item.add_marker(pytest.mark.property)
