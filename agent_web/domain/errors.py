class AgentInputError(ValueError):
    """Raised when a brief cannot be turned into a plan."""


class BriefTooLongError(AgentInputError):
    def __init__(self, length: int, limit: int):
        super().__init__(f"Brief is {length} characters long; the limit is {limit}.")
        self.length = length
        self.limit = limit
