"""Exceptions raised by the bloom data layer and scorers."""


class BloomError(Exception):
    """Base class for BlueBloom errors."""


class DataLoadError(BloomError):
    """A required static data file is missing or malformed."""


class ActorNotFoundError(BloomError, LookupError):
    def __init__(self, actor_id: str):
        super().__init__(f"Actor {actor_id} not found")
        self.actor_id = actor_id


class UnknownRegionError(BloomError, LookupError):
    def __init__(self, region_key: str):
        super().__init__(f"Unknown region: {region_key}")
        self.region_key = region_key


class CitObsError(BloomError):
    """The CitObs open-data API could not be reached or returned an error."""
