import sys

from sat_engine import ConfigError, load_config, load_settings

RESET = "\033[0m"
BOLD = "\033[1m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
RED = "\033[91m"


def check_env():
    try:
        config = load_config()
        settings = load_settings()
    except ConfigError as e:
        print(f"{RED}Invalid .env configuration: {e}{RESET}")
        print("Example .env content:")
        print("SAT_VERBAL_QUESTIONS=27")
        print("SAT_VERBAL_MINUTES=32")
        print("SAT_RESULTS_DIR=results\n")
        sys.exit(1)
    return config, settings


def main():
    config, settings = check_env()
    print(f"\n{BOLD}{CYAN}SAT ADAPTIVE TEST - CLI DEMO{RESET}")
    print(f"{config.total_questions} questions, {config.total_seconds // 60} minutes, results in {settings.results_dir}/")
    print("-" * 40)
    print("1. Take the adaptive practice test")
    print("2. Simulate a cohort of candidates")
    print("0. Exit")
    print("-" * 40)
    choice = input("Choose (0-2): ").strip()
    if choice == "1":
        from cli.run_adaptive_test import run_adaptive_test
        run_adaptive_test()
    elif choice == "2":
        from cli.simulate_cohort import main as simulate
        sys.argv = [sys.argv[0]]
        simulate()
    elif choice == "0":
        print(f"{GREEN}Goodbye!{RESET}")
        sys.exit(0)
    else:
        print(f"{YELLOW}Invalid choice, enter 0-2.{RESET}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n{RED}Stopped.{RESET}")
