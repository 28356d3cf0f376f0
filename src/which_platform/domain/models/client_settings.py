"""Client settings domain model."""

from pydantic import BaseModel, ConfigDict

DEFAULT_ORIGIN_ID = "200080"  # Wynyard Station
DEFAULT_ORIGIN_NAME = "Wynyard"
DEFAULT_DESTINATION_ID = "201510"  # Redfern Station
DEFAULT_DESTINATION_NAME = "Redfern"


class ClientSettings(BaseModel):
    """Route and saved places chosen by a board user."""

    model_config = ConfigDict(frozen=True)

    origin_id: str = DEFAULT_ORIGIN_ID
    origin_name: str = DEFAULT_ORIGIN_NAME
    destination_id: str = DEFAULT_DESTINATION_ID
    destination_name: str = DEFAULT_DESTINATION_NAME
    home_id: str | None = None
    home_name: str | None = None
    work_id: str | None = None
    work_name: str | None = None

    @property
    def has_home(self) -> bool:
        return bool(self.home_id and self.home_name)

    @property
    def has_work(self) -> bool:
        return bool(self.work_id and self.work_name)

    def with_origin(self, stop_id: str, name: str) -> "ClientSettings":
        return self.model_copy(update={"origin_id": stop_id, "origin_name": name})

    def with_destination(self, stop_id: str, name: str) -> "ClientSettings":
        return self.model_copy(update={"destination_id": stop_id, "destination_name": name})

    def with_home(self, stop_id: str, name: str) -> "ClientSettings":
        return self.model_copy(update={"home_id": stop_id, "home_name": name})

    def with_work(self, stop_id: str, name: str) -> "ClientSettings":
        return self.model_copy(update={"work_id": stop_id, "work_name": name})

    def swapped(self) -> "ClientSettings":
        """Return settings with origin and destination exchanged."""
        return self.model_copy(
            update={
                "origin_id": self.destination_id,
                "origin_name": self.destination_name,
                "destination_id": self.origin_id,
                "destination_name": self.origin_name,
            }
        )

    def home_to_work(self) -> "ClientSettings | None":
        """Route from home to work, or None unless both places are saved."""
        if not (self.has_home and self.has_work):
            return None
        return self.with_origin(self.home_id or "", self.home_name or "").with_destination(
            self.work_id or "", self.work_name or ""
        )

    def work_to_home(self) -> "ClientSettings | None":
        """Route from work to home, or None unless both places are saved."""
        if not (self.has_home and self.has_work):
            return None
        return self.with_origin(self.work_id or "", self.work_name or "").with_destination(
            self.home_id or "", self.home_name or ""
        )
