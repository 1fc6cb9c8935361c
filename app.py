from bluetraffic.config import load_config
from bluetraffic.viz.app.single import serve_traffic_map


def main():
  config = load_config()

  serve_traffic_map(
      config,
      title="Bluebikes Traffic",
  )


if __name__ == "__main__":
  main()
