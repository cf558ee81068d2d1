from datetime import datetime

import attrs


@attrs.define
class CheckInEntity:
    qr_code: str
    checkin_time: datetime
    gate: str
