"""ViewModel package for UI state and command surfaces.

Call context:
    ``syncdash/app/main.py`` and the router shell import concrete viewmodels
    from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and ports only. Transport
    and persistence implementations stay in ``syncdash.adapters``.

Responsibilities:
    - Expose mutable UI state (session fields, tab strip) and commands.
    - Notify bound views through ``on_change`` callbacks after mutations.
"""
