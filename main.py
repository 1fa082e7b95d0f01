"""Simple entrypoint to print today's outfit suggestions from the local closet."""

import argparse

from closet_app.app import WardrobeApp
from tools.sample_data import seed_sample_closet


def main() -> None:
    parser = argparse.ArgumentParser(description="Suggest outfits from the local closet.")
    parser.add_argument("--dress-code", default="casual")
    parser.add_argument("--seed-sample", action="store_true", help="add the sample closet when the store is empty")
    args = parser.parse_args()

    closet = WardrobeApp()
    if args.seed_sample and not closet.store.get_all_garments():
        seed_sample_closet(closet.store)

    response = closet.suggest(dress_code=args.dress_code)
    weather = response.weather
    print(
        f"{weather.temp_c:.0f}°C, rain {weather.chance_of_rain:.0%}, wind {weather.wind_kph:.0f} kph "
        f"({response.weather_source})"
    )
    if not response.suggestions:
        print("Not enough clean, suitable garments. Add items or relax the dress code.")
    for index, outfit in enumerate(response.suggestions, start=1):
        names = [garment.name or garment.id for garment in outfit.items]
        print(f"{index}. " + " + ".join(names))


if __name__ == "__main__":
    main()
