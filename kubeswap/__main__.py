from __future__ import annotations

from kubeswap.main import run

if __name__ == "__main__":
    run()
