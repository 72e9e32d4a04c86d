from timeit import timeit

from ember.interpreter import Interpreter
from ember.types.symbol import Symbol
from ember.types.environment import Environment

# Parse once, then time evaluation only
from ember.reader.parser import parse
from ember.evaluation.evaluator import evaluate


def time_interpreter(code: str, rounds: int) -> float:
    """Time the evaluator on one pre-parsed form in a shared root environment."""
    itp = Interpreter(prelude=None)
    expr = parse(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


# Environment lookup chain (no evaluation involved)

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    t = timeit(lambda: env.lookup(key), number=n_lookups)
    return t


FUN_APPLY_CODE = "((fun* (x y) (+ x y)) 1 2)"

TAIL_RECURSION_CODE = r"""
(do
  (def! fact (fun* (n acc)
    (if (< n 2)
        acc
        (fact (- n 1) (* n acc)))))
  (fact 20 1))
"""

# Sum 1..N using tail recursion
ARITH_SUM_CODE = r"""
(do
  (def! sum-n (fun* (n acc)
    (if (< n 1)
        acc
        (sum-n (- n 1) (+ acc n)))))
  (sum-n 500 0))
"""

# Atom updates through swap! in a tail-recursive loop
ATOM_SWAP_CODE = r"""
(let* (counter (atom 0))
  (letrec (bump (fun* (n)
                  (if (< n 1)
                      (deref counter)
                      (do (swap! counter (fun* (c) (+ c 1)))
                          (bump (- n 1))))))
    (bump 200)))
"""


def _print_one(name: str, code: str, rounds: int) -> None:
    t = time_interpreter(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  interpreter: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    # Pure environment benchmark
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_one("function application", FUN_APPLY_CODE, rounds=20000)
    _print_one("tail recursion (factorial)", TAIL_RECURSION_CODE, rounds=500)
    _print_one("arithmetic sum 1..500 (tail-rec)", ARITH_SUM_CODE, rounds=1000)
    _print_one("atom swap loop", ATOM_SWAP_CODE, rounds=200)
