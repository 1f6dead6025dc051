"""Aggregation layer package for people enrichment workflows."""

from .interfaces import PeopleQueryPort, PlanetResolverPort
from .people_aggregator import PeopleAggregator, PeopleAggregatorConfig
from .planet_resolver import PlanetResolver

__all__ = [
	"PeopleAggregator",
	"PeopleAggregatorConfig",
	"PeopleQueryPort",
	"PlanetResolver",
	"PlanetResolverPort",
]
