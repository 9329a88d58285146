"""URL builders for the puddle.farm API and public site."""


class PuddleAPIEndpoints:
    """Builds upstream API URLs and the public links embedded in previews."""

    def __init__(self, api_base_url: str, site_url: str):
        self.api_base_url = api_base_url.rstrip("/")
        self.site_url = site_url.rstrip("/")

    def player(self, player_id: int) -> str:
        """Player record endpoint."""
        return f"{self.api_base_url}/api/player/{player_id}"

    def player_page(self, player_id: int, char_short: str) -> str:
        return f"{self.site_url}/player/{player_id}/{char_short}"

    def avatar(self, player_id: int) -> str:
        return f"{self.site_url}/api/avatar/{player_id}"
