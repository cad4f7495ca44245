from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, PrivateAttr
from pydantic.dataclasses import dataclass as pydantic_dataclass

from osquery_encoding import osquery_tag


@dataclass
class ProcessRow:
    pid: int = field(metadata=osquery_tag("process_id"))
    name: str = ""
    uptime: float = 0.0
    on_disk: bool = False
    parent: Optional[int] = None
    cmdline: str = field(default="", metadata=osquery_tag("-"))
    _handle: int = 0


class UserModel(BaseModel):
    uid: int = Field(0, json_schema_extra=osquery_tag("user_id"))
    username: str = ""
    shell: Optional[str] = None
    password_hash: str = Field("", json_schema_extra=osquery_tag("-"))
    _session: str = PrivateAttr(default="secret")


class Mount(NamedTuple):
    path: str
    blocks: int


class Unprintable:
    def __str__(self):
        raise RuntimeError("no string form")


@pydantic_dataclass
class SocketRow:
    port: int = Field(0, json_schema_extra=osquery_tag("local_port"))
    family: str = "inet"
    state: str = field(default="", metadata=osquery_tag("-"))
