from django.apps import AppConfig


class HangmanConfig(AppConfig):
    name = "hangman"
    verbose_name = "Hangman"
