from typing import Any

# --- Permutation Class ---
# Stores a single generated domain and the engine that produced it. Behaves
# like a dictionary but allows attribute-style access (e.g., p.domain instead
# of p['domain']) and hashes on the domain only, so a set of permutations
# deduplicates by exact domain string.

class Permutation(dict):
    """
    Represents a single domain variation.

    Acts as a dictionary holding 'fuzzer' (the engine name) and 'domain', with
    attribute-style access and equality based on the domain string alone.
    """
    def __getattr__(self, item: str) -> Any:
       try:
          return self[item]
       except KeyError:
          raise AttributeError(f"'{type(self).__name__}' object has no attribute '{item}'") from None

    __setattr__ = dict.__setitem__

    def __init__(self, **kwargs: Any):
       """
       Args:
          fuzzer (str): Name of the engine that generated this variation. Defaults to ''.
          domain (str): The generated domain name string. Defaults to ''.
          **kwargs: Any additional data to carry along.
       """
       super().__init__()
       self['fuzzer'] = kwargs.pop('fuzzer', '')
       self['domain'] = kwargs.pop('domain', '')
       self.update(kwargs)

    def __hash__(self) -> int:
       return hash(self.get('domain', ''))

    def __eq__(self, other: object) -> bool:
       if not isinstance(other, dict):
             return NotImplemented
       return self.get('domain', '') == other.get('domain', '')

    def __lt__(self, other: 'Permutation') -> bool:
       """Sorts by engine name, then by domain."""
       if not isinstance(other, Permutation):
             return NotImplemented
       return (self.fuzzer, self.domain) < (other.fuzzer, other.domain)

    def copy(self) -> 'Permutation':
       return Permutation(**self)

    def __repr__(self) -> str:
        core_items = f"fuzzer='{self.fuzzer}', domain='{self.domain}'"
        other_items = ", ".join(f"{k}='{v}'" for k, v in self.items() if k not in ('fuzzer', 'domain'))
        items_str = core_items + (f", {other_items}" if other_items else "")
        return f"{type(self).__name__}({items_str})"
