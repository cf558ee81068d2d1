from datetime import date

import attrs


@attrs.frozen
class EventKey:
    """Composite identity of an event: name + date + venue (name, address)"""

    name: str
    date: date
    venue_name: str
    venue_address: str
