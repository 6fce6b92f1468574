"""Runner that compiles and checks small Rust exercises, with worked drill solutions."""

__version__ = "0.1.0"