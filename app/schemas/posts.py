from pydantic import BaseModel


class PostCreate(BaseModel):
    name: str


class PostResponse(BaseModel):
    id: int
    device_id: int
    name: str

    class Config:
        from_attributes = True
