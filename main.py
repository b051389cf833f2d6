"""
HandsFree - Hand-Tracked Pointer Control

Entry point for the application.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="HandsFree - pinch to click, pinch and drag to scroll",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: config.yaml)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show camera feed with landmarks and gesture state instead of the overlay",
    )

    parser.add_argument(
        "--no-dispatch",
        action="store_true",
        help="Recognize gestures without issuing mouse input",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every click, scroll and suppressed release",
    )

    return parser.parse_args(argv)


def report_worker_error(app, message):
    """Log a tracking failure and quit; nothing else can drive the cursor."""
    logging.error("WORKER ERROR: %s", message)
    print(f"ERROR: {message}")
    app.quit()


def run_webcam_debug(config):
    """
    Run webcam in debug mode - shows camera feed with landmarks.
    Useful for tuning the pinch and scroll thresholds.
    """
    import cv2
    from handsfree.tracking import GestureRecognizer
    from handsfree.tracking.hand_tracker import HandTracker

    tracker = HandTracker(config)
    recognizer = GestureRecognizer(config.gestures)

    print("Starting webcam debug mode...")
    print("Press 'q' to quit")
    print("-" * 40)

    if not tracker.start():
        print("ERROR: Could not start hand tracker")
        return 1

    try:
        while True:
            landmarks = tracker.get_landmarks()
            sample, action = recognizer.on_frame(landmarks)

            frame = tracker.get_frame_with_landmarks(landmarks)
            if frame is not None:
                h, w = frame.shape[:2]
                color = (0, 255, 0) if sample.pinching else (0, 0, 255)
                cv2.circle(frame, (int(sample.x * w), int(sample.y * h)), 12, color, -1)

                distance = recognizer.pinch_distance
                info_lines = [
                    f"Pinching: {sample.pinching}",
                    f"Pinch dist: {distance:.3f}" if distance is not None else "Pinch dist: -",
                    f"Cursor: ({sample.x:.2f}, {sample.y:.2f})",
                ]
                for i, line in enumerate(info_lines):
                    cv2.putText(
                        frame, line, (10, 30 + i * 25),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.6, (255, 255, 255), 1
                    )

                if action is not None:
                    print(f"[{tracker.frame_count:5d}] {action}")

                cv2.imshow("HandsFree Debug", frame)

            if cv2.waitKey(1) & 0xFF == ord('q'):
                break

    finally:
        tracker.stop()
        cv2.destroyAllWindows()

    return 0


def run_overlay_mode(config):
    """Run HandsFree with the cursor overlay and pointer dispatch (Multithreaded)."""
    import signal
    import atexit
    from PyQt5.QtWidgets import QApplication
    from PyQt5.QtCore import QThread, Qt
    from handsfree.tracking.worker import TrackingWorker
    from handsfree.dispatch import PointerDispatcher, ScreenMapper
    from handsfree.ui import CursorOverlay

    app = QApplication(sys.argv)

    overlay = CursorOverlay(
        cursor_size=config.ui.cursor_size,
        show_skeleton=config.ui.show_skeleton,
    )
    overlay.show()

    sx, sy, sw, sh = overlay.screen_size()
    dispatcher = PointerDispatcher(
        ScreenMapper(sw, sh, sx, sy),
        config.pointer,
        on_step_aside=overlay.step_aside_requested.emit,
    )

    thread = QThread()
    worker = TrackingWorker(config)
    worker.moveToThread(thread)

    def cleanup():
        """Ensure camera is released on exit."""
        print("\nCleaning up camera resources...")
        worker.stop_process()
        thread.quit()
        thread.wait(2000)
        dispatcher.shutdown()
        print("Cleanup complete.")

    atexit.register(cleanup)

    def signal_handler(signum, frame):
        """Handle Ctrl+C and kill signals gracefully."""
        print(f"\nReceived signal {signum}, shutting down...")
        app.quit()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    def handle_action(action):
        """Dispatch off the UI thread; strokes sleep while they play out."""
        dispatcher.dispatch_async(action)

    # Connect signals (Use QueuedConnection to ensure UI updates happen in main thread)
    thread.started.connect(worker.start_process)
    worker.cursor_updated.connect(overlay.update_cursor, Qt.QueuedConnection)
    if config.ui.show_skeleton:
        worker.landmarks_updated.connect(overlay.update_landmarks, Qt.QueuedConnection)
    worker.action_detected.connect(handle_action, Qt.QueuedConnection)
    worker.error.connect(lambda msg: report_worker_error(app, msg), Qt.QueuedConnection)

    thread.start()

    try:
        result = app.exec_()
    finally:
        cleanup()
        atexit.unregister(cleanup)  # Avoid double cleanup

    return result


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from handsfree.tracking import load_config, ConfigError
    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"ERROR: Invalid config: {e}")
        return 2

    # Apply CLI overrides
    if args.no_dispatch:
        config.pointer.enabled = False

    print("HandsFree starting...")
    print(f"  Camera: {config.camera.device_id}")
    print(f"  Pinch threshold: {config.gestures.pinch_threshold}")
    print(f"  Dispatch: {config.pointer.enabled}")
    print()

    if args.debug:
        return run_webcam_debug(config)
    return run_overlay_mode(config)


if __name__ == "__main__":
    sys.exit(main())
