from typing import Optional, List
from pydantic import BaseModel, ConfigDict, field_validator

ACCESS_PORT = "Access Port"
TRUNK_PORT = "Trunk port"

def access_label(access) -> str:
    """Port type shown to the user; only a flag of "1" marks an access port"""
    if access is not None and str(access) == "1":
        return ACCESS_PORT
    return TRUNK_PORT

def as_text(value) -> Optional[str]:
    """Stored values as text; INTEGER/NUMERIC columns come back as numbers"""
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='replace')
    return str(value)

class InventoryRecord(BaseModel):
    """One row of the network_inventory table, as returned to the page"""
    model_config = ConfigDict(extra="allow")

    switch_name: Optional[str] = None
    switch_ip: Optional[str] = None
    vendor: Optional[str] = None
    mac_address: str
    port_name: Optional[str] = None
    access: Optional[str] = None
    access_val: str = TRUNK_PORT
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator('switch_name', 'switch_ip', 'vendor', 'mac_address', 'port_name',
                     'access', 'created_at', 'updated_at', mode='before')
    @classmethod
    def stored_value_as_text(cls, v):
        return as_text(v)

    @classmethod
    def from_row(cls, row: dict):
        """Build a record from a raw row, deriving the port type label"""
        data = dict(row)
        data['access_val'] = access_label(data.get('access'))
        return cls(**data)

class SearchResponse(BaseModel):
    success: bool
    result: List[InventoryRecord] = []
    message: Optional[str] = None

    def payload(self) -> dict:
        """JSON body: result on success, message on failure"""
        if self.success:
            return {"success": True, "result": [r.model_dump() for r in self.result]}
        return {"success": False, "message": self.message}
