import time
from algorithms.registry import ALGORITHMS
from services.runner import run_matching

text = "abcd" * 50_000
pat = "bcda"

for desc in ALGORITHMS.values():
    t0 = time.time()
    res = desc.matcher(text, pat, False)
    print(desc.name, "secs:", round(time.time()-t0, 4), "comparisons:", res.comparisons, "steps:", len(res.steps))

print("Compare all, three patterns")
run = run_matching(text, "bcda, dabc, cdx", "all")
for key, res in run.items():
    print(key, res.match_count, "matches", round(res.elapsed_ms, 2), "ms")
