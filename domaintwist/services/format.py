import json


class Format:
    """Renders a list of Permutation objects for API responses."""

    def __init__(self, domains=None):
        self.domains = list(domains or [])

    def json(self, indent=2, sort_keys=True):
        return json.dumps(self.domains, indent=indent, sort_keys=sort_keys, ensure_ascii=False)

    def csv(self):
        """
        Converts the permutations to a CSV string with 'fuzzer' and 'domain'
        first, followed by any extra keys in alphabetical order.
        """
        cols = ['fuzzer', 'domain']
        for domain in self.domains:
            for k in domain.keys() - cols:
                cols.append(k)
        cols = cols[:2] + sorted(cols[2:])

        csv = [','.join(cols)]
        for domain in self.domains:
            row = []
            for val in [domain.get(c, '') for c in cols]:
                if isinstance(val, (list, tuple)):
                    val = ';'.join(str(v) for v in val)
                val = str(val)
                row.append('"{}"'.format(val.replace('"', '""')) if ',' in val or '"' in val else val)
            csv.append(','.join(row))

        return '\n'.join(csv)

    def list(self):
        return '\n'.join(domain['domain'] for domain in self.domains)
