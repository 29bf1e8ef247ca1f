from checksum_engine import catalog
from checksum_engine.checksum import Checksum


if __name__ == "__main__":
    for name in catalog.names():
        entry = catalog.get_entry(name)
        got = Checksum(entry.algorithm).calculate(catalog.CHECK_INPUT)
        status = "ok" if got == entry.check else "FAIL"
        print(f"{name:<18} {got:#010x}  {status}")
