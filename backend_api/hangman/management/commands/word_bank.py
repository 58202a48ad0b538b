from django.core.management.base import BaseCommand

from hangman.gameplay import CATEGORIES, DIFFICULTIES, WordBank


class Command(BaseCommand):
    help = "Show the words the word bank can deal, per difficulty and category."

    def add_arguments(self, parser):
        parser.add_argument("--difficulty", choices=DIFFICULTIES)
        parser.add_argument("--category", choices=CATEGORIES)
        parser.add_argument("--list", action="store_true", help="List the words, not just the counts.")

    def handle(self, *args, **options):
        bank = WordBank()
        difficulties = [options["difficulty"]] if options["difficulty"] else list(DIFFICULTIES)
        categories = [options["category"]] if options["category"] else list(CATEGORIES)

        for category in categories:
            for difficulty in difficulties:
                words = bank.words(difficulty, category)
                line = f"{category}/{difficulty}: {len(words)} words"
                if not words:
                    self.stdout.write(self.style.WARNING(line))
                    continue
                self.stdout.write(line)
                if options["list"]:
                    self.stdout.write("  " + " ".join(words))
