"""Project-level configuration stored in .devenvrc.json."""

from pydantic import BaseModel, ConfigDict, Field

from dockstrap.models.docker import DockerOptions, Mode, Port, Volume


class ProjectConfig(BaseModel):
    """Saved generation defaults for a project.

    Unset fields leave the generator defaults alone.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    mode: Mode | None = None
    port: Port | None = None
    node_version: str | None = Field(default=None, alias="nodeVersion")
    volumes: list[Volume] = []
    networks: list[str] = []

    def docker_options(self, **overrides) -> DockerOptions:
        """Build DockerOptions from this config; non-None overrides win."""
        values: dict = {"volumes": self.volumes, "networks": self.networks}
        if self.mode is not None:
            values["development"] = self.mode == Mode.DEVELOPMENT
        if self.port is not None:
            values["port"] = self.port
        if self.node_version:
            values["node_version"] = self.node_version

        values.update({key: value for key, value in overrides.items() if value is not None})
        return DockerOptions(**values)
