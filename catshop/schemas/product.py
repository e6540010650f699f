from pydantic import BaseModel


class ProductResponse(BaseModel):
    id: int
    name: str
    breed: str
    age: int
    price: int
    image: str


class ProductPageResponse(BaseModel):
    products: list[ProductResponse]
    pages: int
