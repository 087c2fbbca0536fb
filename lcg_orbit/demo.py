from . import build_scene, format_cycle_report, format_trajectory, parse_parameters

DEMO = ("10", "7", "7", "0")


def run():
    params = parse_parameters(*DEMO)
    print(f"Parameters: {params}\n")
    scene = build_scene(params, 800, 600)
    print(f"Trajectory: {format_trajectory(scene.result)}\n")
    for edge in scene.edges():
        print(f"  step {edge.step}: {edge.source} -> {edge.target}")
    print(f"\n{format_cycle_report(scene.result.cycle)}")


if __name__ == "__main__":
    run()
