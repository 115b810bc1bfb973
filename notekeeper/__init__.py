"""
NoteKeeper.

- core/: Configuration, logging, exceptions, shared utilities
- schemas/: Note, draft and priority models
- events/: Intent envelopes dispatched to the note store
- store/: In-memory note store
- services/: Form controller, identity generation, filtered view
- tui/: Textual terminal interface
"""
