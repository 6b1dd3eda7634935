class FleetStateError(Exception):
    """
    errors related to FleetState operations
    """

    def __init__(self, msg):
        self.message = msg

    def __str__(self):
        return repr(self.message)


class EntityError(Exception):
    """
    errors related to methods on entities such as vehicles or drivers.
    """

    def __init__(self, msg):
        self.message = msg

    def __str__(self):
        return repr(self.message)
