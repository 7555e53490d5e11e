import os, sys

def main():
    if "GDK_BACKEND" not in os.environ:
        st = os.environ.get("XDG_SESSION_TYPE", "").lower()
        if os.environ.get("WAYLAND_DISPLAY") or st == "wayland":
            os.environ["GDK_BACKEND"] = "wayland"
    from .app import main as app_main
    return app_main(sys.argv[1:])

if __name__ == "__main__":
    sys.exit(main())
