"""
Reset all focus timer stats by clearing the stored session history.
"""

from BackEnd.core.config import load_config
from BackEnd.repos.session_repo import open_ledger

def reset_all_stats(ask=input):
    """Clear the session ledger after confirmation. Returns True if cleared."""
    config = load_config()
    ledger = open_ledger(config)

    if len(ledger) == 0:
        print("No sessions recorded. Stats are already at 0.")
        return False

    print(f"Found {len(ledger)} recorded sessions.")
    confirm = ask("Are you sure you want to reset all stats? This cannot be undone. (yes/no): ")
    if confirm.strip().lower() in ['yes', 'y']:
        ledger.clear()
        print("✓ All stats have been reset to 0")
        return True
    print("Reset cancelled.")
    return False

if __name__ == "__main__":
    print("=" * 50)
    print("Focus Timer - Reset All Stats")
    print("=" * 50)
    reset_all_stats()
