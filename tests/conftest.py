import os

# Pin formatting before `settings` is first imported.
os.environ["TIPCALC_LOCALE"] = "en_US"
os.environ["TIPCALC_CURRENCY"] = "USD"
