class FilterError(Exception):
    pass

class NoShippingRateError(Exception):
    def __init__(self, pincode=None):
        super().__init__()
        self.pincode = pincode
        self.args = (pincode,)

    def __str__(self):
        return f"No shipping rate is configured for pincode '{self.pincode}'"
