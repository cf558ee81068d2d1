import attrs


@attrs.frozen
class SeatPosition:
    """Seat coordinates within an event; row and number are labels (`AA`, `12B`), not ordinals"""

    section: str
    row: str
    number: str

    @property
    def label(self) -> str:
        """Human-readable seat location, e.g. `A-1-5`"""
        return f'{self.section}-{self.row}-{self.number}'
