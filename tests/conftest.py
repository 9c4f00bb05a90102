import pytest

from territory.data.locations_repository import LocationRegistry, build_registry
from territory.services.distributors import DistributorService, DistributorStore

LOCATION_ROWS = [
    ("LA", "CA", "US", "LA", "CA", "US"),
    ("SF", "CA", "US", "SF", "CA", "US"),
    ("NYC", "NY", "US", "NYC", "NY", "US"),
    ("BUF", "NY", "US", "BUF", "NY", "US"),
    ("CHEN", "TN", "IN", "Chennai", "Tamil Nadu", "India"),
    ("MDU", "TN", "IN", "Madurai", "Tamil Nadu", "India"),
    ("BLR", "KA", "IN", "Bangalore", "Karnataka", "India"),
]


@pytest.fixture
def registry() -> LocationRegistry:
    return build_registry(LOCATION_ROWS)


@pytest.fixture
def service(registry: LocationRegistry) -> DistributorService:
    return DistributorService(registry, DistributorStore())
