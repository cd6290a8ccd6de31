from pydantic import BaseModel


class EventTypeCreate(BaseModel):
    name: str


class EventTypeResponse(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True
