from tailorhub.booking.pricing import price_breakdown


class TestPriceBreakdown:
    def test_online_first_order(self):
        breakdown = price_breakdown(1000.0, "online", first_order=True)
        labels = [line.label for line in breakdown.lines]
        assert labels == ["Service charge", "Pickup & delivery", "First order discount", "Online payment discount"]
        assert breakdown.total == 1000.0 + 50.0 - 100.0 - 50.0

    def test_cod_repeat_order(self):
        breakdown = price_breakdown(1000.0, "cod", first_order=False)
        assert breakdown.total == 1050.0

    def test_total_never_negative(self):
        assert price_breakdown(0.0, "online", first_order=True).total == 0.0
