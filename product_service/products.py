from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float

    def to_dict(self):
        return asdict(self)


# fixed catalog, order matters for clients
PRODUCTS = (
    Product(id=1, name="Dog Food", price=19.99),
    Product(id=2, name="Cat Food", price=34.99),
    Product(id=3, name="Bird Seeds", price=10.99),
)
