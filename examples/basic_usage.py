"""Basic usage examples for the Jolpica and OpenF1 clients."""

from f1feeds import JolpicaClient, OpenF1Client


def main() -> None:
    with JolpicaClient() as ergast:
        # Season calendar with per-session dates
        print("=== 2024 Calendar ===")
        races = ergast.races(2024)
        for race in races[:5]:
            sprint = " (sprint)" if race.sprint else ""
            print(f"  R{race.round} {race.race_name} - {race.date}{sprint}")

        if not races:
            print("  No races found.")
            return

        # Podium of the opening round
        first = races[0]
        print(f"\n=== {first.race_name} podium ===")
        for row in ergast.race_results(first.season, first.round)[:3]:
            time = row.time.time if row.time else row.status
            print(f"  P{row.position} {row.driver.full_name} ({time})")

        # Championship leaders
        print("\n=== Driver standings (top 5) ===")
        for standing in ergast.driver_standings(2024)[:5]:
            print(f"  {standing.position}. {standing.driver.full_name} - {standing.points:g} pts")

    with OpenF1Client() as f1:
        # Live provider: meetings carry no round, sessions carry real keys
        print("\n=== 2024 Race sessions (OpenF1) ===")
        sessions = f1.sessions(year=2024, session_name="Race")
        for s in sessions[:5]:
            print(f"  {s.session_key}: {s.location} {s.date_start}")

        if not sessions:
            print("  No sessions found.")
            return

        session_key = sessions[0].session_key
        roster = {d.driver_number: d for d in f1.drivers(session_key=session_key)}
        print(f"\n=== Classification (session_key={session_key}) ===")
        for result in f1.session_result(session_key=session_key)[:5]:
            driver = roster.get(result.driver_number)
            name = driver.full_name if driver else f"#{result.driver_number}"
            print(f"  P{result.position} {name}")


if __name__ == "__main__":
    main()
