"""Application wiring: configuration, router shell, and the runtime root."""
