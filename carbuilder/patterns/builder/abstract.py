from . import IBuilder


class AbstractBuilder(IBuilder):
    """
    Builder base, which starts off every concrete builder with a fresh,
    empty product. Retrieval of the product is left to the concrete
    builders, since the products don't share a common type.
    """
    def __init__(self):
        self.reset()
