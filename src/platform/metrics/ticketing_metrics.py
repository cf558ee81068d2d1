from prometheus_client import Counter, Histogram


class TicketingMetrics:
    """
    Ticketing Service Core Metrics Collector

    Tracks the purchase workflow (outcome, latency, QR collisions) and venue check-ins.
    Label values stay low-cardinality: results are error names, never seat keys.
    """

    def __init__(self):
        # ========== Purchase Workflow Metrics ==========
        self.purchase_requests = Counter(
            'ticket_purchase_requests_total',
            'Total ticket purchase requests',
            ['result'],  # result: success / CustomerNotFoundError / SeatUnavailableError / ...
        )

        self.purchase_duration = Histogram(
            'ticket_purchase_duration_seconds',
            'Ticket purchase processing time (whole transaction)',
            ['result'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        self.tickets_issued = Counter(
            'tickets_issued_total',
            'Total tickets issued by committed purchases',
        )

        self.qr_code_collisions = Counter(
            'ticket_qr_code_collisions_total',
            'QR code unique violations that triggered a regenerate-and-retry',
        )

        # ========== Venue Check-in Metrics ==========
        self.check_ins = Counter(
            'ticket_check_ins_total',
            'Total check-in attempts',
            ['result'],  # result: success / TicketNotFoundError / AlreadyCheckedInError
        )

    # ========== Helper Methods ==========

    def record_purchase(self, *, result: str, ticket_count: int, duration: float):
        self.purchase_requests.labels(result=result).inc()
        self.purchase_duration.labels(result=result).observe(duration)
        if ticket_count:
            self.tickets_issued.inc(ticket_count)

    def record_qr_code_collision(self):
        self.qr_code_collisions.inc()

    def record_check_in(self, *, result: str):
        self.check_ins.labels(result=result).inc()


# Global metrics instance
metrics = TicketingMetrics()
