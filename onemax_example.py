import bitga

params = bitga.Parameters(
    length = 100,
    size = 50,
    generations = 500,
    crossover_prob = 70,
    mutation_prob = 1,
    )

with bitga.Evolution(params, rng = 42, verbose = 1) as evolution:
    history = evolution.evolve(progress_bars = 1)

print(f"Number of ones achieved: {history.fittest['fitness']}")

history.plot(show_min = True)
