class BoostError(Exception):
    pass


class CardNotFoundError(BoostError):
    def __init__(self, issuer: str, product_name: str):
        super().__init__(f"No card found for issuer={issuer!r}, name={product_name!r}")
        self.issuer = issuer
        self.product_name = product_name


class PlacesError(BoostError):
    pass


class ConfigurationError(BoostError):
    pass
