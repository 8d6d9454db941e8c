"""
src/f4jumble/audit.py
Auditoría de Difusión (Efecto Cascada).
Para cada longitud: mensajes aleatorios, se altera un byte y se mide
qué fracción de la salida de F4Jumble cambia. Verifica también el ida y vuelta.
"""
import os
import random
import time
from dataclasses import dataclass
from multiprocessing import Pool, cpu_count
from typing import List, Optional, Sequence

from .hashing.invariants import MIN_LEN_M
from .kernel.feistel import f4_jumble, f4_jumble_inv

DEFAULT_LENGTHS = (MIN_LEN_M, 64, 96, 128, 200, 1024, 4096)


@dataclass
class AuditResult:
    length: int
    trials: int
    min_diffusion: float
    mean_diffusion: float
    roundtrip_failures: int

    @property
    def ok(self) -> bool:
        return self.roundtrip_failures == 0


def diffusion_ratio(a: bytes, b: bytes) -> float:
    """Distancia de Hamming por bytes, normalizada a [0, 1]."""
    if len(a) != len(b):
        raise ValueError(f"Longitudes distintas: {len(a)} != {len(b)}")
    if not a:
        return 0.0
    diff = sum(1 for x, y in zip(a, b) if x != y)
    return diff / len(a)


def audit_worker(args) -> AuditResult:
    length, trials, seed = args
    rng = random.Random(seed)

    ratios = []
    fails = 0
    for _ in range(trials):
        m = bytes(rng.getrandbits(8) for _ in range(length))

        # Un solo byte alterado (nunca XOR con 0)
        pos = rng.randrange(length)
        m2 = bytearray(m)
        m2[pos] ^= rng.randrange(1, 256)

        j1 = f4_jumble(m)
        j2 = f4_jumble(bytes(m2))
        ratios.append(diffusion_ratio(j1, j2))

        if f4_jumble_inv(j1) != m or f4_jumble(f4_jumble_inv(m)) != m:
            fails += 1

    return AuditResult(
        length=length,
        trials=trials,
        min_diffusion=min(ratios),
        mean_diffusion=sum(ratios) / len(ratios),
        roundtrip_failures=fails,
    )


def run_diffusion_audit(lengths: Sequence[int] = DEFAULT_LENGTHS,
                        trials: int = 200,
                        workers: Optional[int] = None,
                        seed: Optional[int] = None) -> List[AuditResult]:
    """
    Ejecuta la auditoría repartiendo una longitud por tarea.
    Con workers=1 se ejecuta en el proceso actual (sin Pool).
    """
    if trials < 1:
        raise ValueError(f"trials debe ser >= 1, recibido {trials}")
    if seed is None:
        seed = int.from_bytes(os.urandom(8), 'little')

    tasks = [(length, trials, seed + k) for k, length in enumerate(lengths)]
    cores = workers or cpu_count()

    print(f"[*] AUDITORÍA DE DIFUSIÓN F4JUMBLE")
    print(f"[*] Longitudes: {list(lengths)} | Pruebas por longitud: {trials} | Semilla: {seed}")
    print("-" * 65)

    t0 = time.time()
    if cores == 1:
        results = [audit_worker(t) for t in tasks]
    else:
        with Pool(cores) as pool:
            results = pool.map(audit_worker, tasks)

    for r in results:
        status = "OK" if r.ok else "FALLO"
        print(f"   -> lenM={r.length:>8} | min={r.min_diffusion:.3f} "
              f"| media={r.mean_diffusion:.3f} | ida/vuelta: {status}", flush=True)

    print("-" * 65)
    print(f"[*] Tiempo: {time.time()-t0:.2f}s")
    errs = sum(r.roundtrip_failures for r in results)
    if errs == 0:
        print("\n🏆 PERMUTACIÓN VALIDADA: CERO ERRORES DE IDA Y VUELTA.")
    else:
        print(f"\n❌ ERRORES DETECTADOS: {errs}")
    return results


if __name__ == '__main__':
    run_diffusion_audit()
