class UnregisteredSettingError(Exception):
    """Raised when a setting key is used without being registered first."""

    def __init__(self, key: str) -> None:
        super().__init__(f"There's no setting registered with key `{key}`")
        self.key = key
