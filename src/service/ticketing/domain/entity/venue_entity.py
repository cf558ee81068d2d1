import attrs


@attrs.define
class VenueEntity:
    name: str
    address: str
    capacity: int
