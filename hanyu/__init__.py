"""Hanyu Mate: a personal Chinese vocabulary notebook.

Subpackages:
- hanyu.common: Shared utilities (config, logging, storage, openai client)
- hanyu.schema: Record types (saved words, study sessions, character details)
- hanyu.store: Persisted word store and study log
- hanyu.study: Quiz runs and study statistics
- hanyu.lookup: Word search and character analysis over OpenAI
"""
