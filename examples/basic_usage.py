"""Basic usage examples for the weather client."""

from weatherdash import Provider, UnitSystem, WeatherClient, WeatherError
from weatherdash.config import get_settings


def main() -> None:
    settings = get_settings()
    with WeatherClient.from_settings(settings) as client:
        # Same city in both unit systems
        for units in UnitSystem:
            print(f"=== London ({units.value}) ===")
            reading = client.fetch("London", units)
            wind_unit = client.provider.wind_speed_label(units)
            print(f"  {reading.temperature}{units.temperature_label}, {reading.description}")
            print(f"  Wind: {reading.wind_speed} {wind_unit}")
            print(f"  Source: {reading.source}")

        # Unknown cities come back as an HTTP error with the provider's body
        print("\n=== Unknown city ===")
        try:
            client.fetch("Atlantis")
        except WeatherError as exc:
            print(f"  {type(exc).__name__}: {exc}")

    print(f"\nConfigured provider: {Provider(settings.provider).display_name}")


if __name__ == "__main__":
    main()
