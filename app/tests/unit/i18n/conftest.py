"""Feature-level fixtures for i18n resolution tests.

Dictionaries are written as YAML and parsed back, the way translation
payloads usually reach the resolver from the host application.
"""

from unittest.mock import Mock

import pytest
import yaml

from tests.factories.i18n import make_namespaces, make_resolver


@pytest.fixture
def yaml_namespaces(tmp_path):
    """Write sample namespaces to YAML files and load them back.

    Returns a mapping like:
    - common -> common.en.yml
    - errors -> errors.en.yml
    """
    namespaces = {}
    for namespace, dictionary in make_namespaces().items():
        path = tmp_path / f"{namespace}.en.yml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(dictionary, f, allow_unicode=True)
        with open(path, "r", encoding="utf-8") as f:
            namespaces[namespace] = yaml.safe_load(f)
    return namespaces


@pytest.fixture
def reporter():
    """Mock missing-key reporter."""
    return Mock()


@pytest.fixture
def resolver(yaml_namespaces, reporter):
    """Resolver over the YAML-loaded namespaces with a mock reporter."""
    return make_resolver(namespaces=yaml_namespaces, reporter=reporter)


@pytest.fixture
def russian_namespaces():
    """Namespaces using Russian plural categories."""
    return {
        "cart": {
            "apples_one": "{{count}} яблоко",
            "apples_few": "{{count}} яблока",
            "apples_many": "{{count}} яблок",
        }
    }
