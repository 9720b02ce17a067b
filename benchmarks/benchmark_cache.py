import time
import numpy as np
import cachematrix

def benchmark_inverse(n, iterations=20):
    print(f"\n--- Benchmarking cached inverse (N={n}) ---")

    a_np = np.random.rand(n, n)
    # Make it diagonally dominant to ensure invertibility
    a_np += np.eye(n) * n

    m = cachematrix.CacheMatrix(a_np)

    # First call computes
    start = time.perf_counter()
    _ = cachematrix.cache_solve(m)
    end = time.perf_counter()
    miss_time = end - start
    print(f"cache_solve (miss): {miss_time:.6f} s")

    # Every later call is a cache hit
    start = time.perf_counter()
    for _ in range(iterations):
        res = cachematrix.cache_solve(m)
    end = time.perf_counter()
    hit_time = (end - start) / iterations
    print(f"cache_solve (hit):  {hit_time:.6f} s")

    # NumPy recomputation every time
    start = time.perf_counter()
    for _ in range(iterations):
        res_np = np.linalg.inv(a_np)
    end = time.perf_counter()
    np_time = (end - start) / iterations
    print(f"np.linalg.inv:      {np_time:.6f} s")

    speedup = np_time / hit_time if hit_time > 0 else 0
    print(f"Speedup (hit vs recompute): {speedup:.1f}x")

if __name__ == "__main__":
    for n in [64, 256, 1024]:
        benchmark_inverse(n)
