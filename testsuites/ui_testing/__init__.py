"""
UI testing package: the Playwright DSL framework, page objects and browser tests.
"""
