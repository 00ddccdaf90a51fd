"""
Interactive prompts for values not given on the command line
The phrase is always read without echo.
"""

import getpass

from password_mint.constants import MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH


SESSION_QUIT = ("", "q", "quit", "exit")
SESSION_FORGET = "forget"


class DerivationPrompts:
    """Handles interactive prompts for a derivation"""

    def prompt_site(self):
        """Prompt for the site or app name"""
        while True:
            value = input("[MINT] Site or app: ").strip()
            if value:
                return value
            print("       Please enter a site or app name")

    def prompt_phrase(self):
        """Prompt for the master phrase (not echoed)"""
        while True:
            value = getpass.getpass("[MINT] Master phrase: ")
            if value.strip():
                return value
            print("       Please enter your master phrase")

    def prompt_version(self, default):
        """Prompt for the rotation version"""
        value = input(f"[MINT] Version (default: {default}): ").strip()
        return value or default

    def prompt_length(self, default):
        """Prompt for the password length"""
        while True:
            try:
                value = input(f"[MINT] Length (default: {default}): ").strip()
                if value == '':
                    return default
                value = int(value)
                if value < MIN_PASSWORD_LENGTH:
                    print(f"       Must be at least {MIN_PASSWORD_LENGTH}")
                    continue
                if value > MAX_PASSWORD_LENGTH:
                    print(f"       Maximum is {MAX_PASSWORD_LENGTH}")
                    continue
                return value
            except ValueError:
                print("       Please enter a valid number")

    def prompt_session_site(self):
        """
        Prompt for the next site in a session
        Returns None when the user wants to stop, SESSION_FORGET to forget.
        """
        value = input("\n[MINT] Site or app (blank to quit, 'forget' to clear phrase): ").strip()
        if value.lower() in SESSION_QUIT:
            return None
        if value.lower() == SESSION_FORGET:
            return SESSION_FORGET
        return value

    def confirm_remember(self):
        """Ask before keeping the phrase in memory for the session"""
        print("[MINT] Remember the phrase until this session ends?")
        print("       (Held in memory only - anyone at this terminal can reuse it)")
        while True:
            choice = input("       [y/N]: ").strip().lower()
            if choice in ('', 'n', 'no'):
                return False
            if choice in ('y', 'yes'):
                return True
            print("       Please enter y or n")
