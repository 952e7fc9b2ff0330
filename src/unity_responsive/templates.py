# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""String templates for the responsive entry page and stylesheet.

``TEMPLATE_HTML`` is a :meth:`str.format` template, so literal braces in the
embedded script are doubled. ``TEMPLATE_CSS`` has no placeholders.
"""

TEMPLATE_HTML = """<!DOCTYPE html>
<html lang="en-us">
  <head>
    <meta charset="utf-8" />
    <meta http-equiv="Content-Type" content="text/html; charset=utf-8" />
    <meta
      name="viewport"
      content="width=device-width, height=device-height, initial-scale=1.0, user-scalable=no, shrink-to-fit=yes"
    />
    <title>{title}</title>
    <link rel="shortcut icon" href="{icon}" />
    <link rel="stylesheet" href="TemplateData/style.css" />
  </head>
  <body>
    <div id="unity-container" class="unity-mobile">
      <canvas
        id="unity-canvas"
        width="{width}"
        height="{height}"
        tabindex="-1"
      ></canvas>
      <div id="unity-loading-bar">
        <div id="unity-logo"></div>
        <div id="unity-progress-bar-empty">
          <div id="unity-progress-bar-full"></div>
        </div>
      </div>
      <div id="unity-warning"></div>
    </div>
    <script>
      var canvas = document.querySelector("#unity-canvas");

      // Shows a temporary message banner/ribbon for a few seconds, or
      // a permanent error message on top of the canvas if type=='error'.
      // If type=='warning', a yellow highlight color is used.
      function unityShowBanner(msg, type) {{
        var warningBanner = document.querySelector("#unity-warning");
        function updateBannerVisibility() {{
          warningBanner.style.display = warningBanner.children.length
            ? "block"
            : "none";
        }}
        var div = document.createElement("div");
        div.innerHTML = msg;
        warningBanner.appendChild(div);
        if (type == "error") div.style = "background: red; padding: 10px;";
        else {{
          if (type == "warning")
            div.style = "background: yellow; padding: 10px;";
          setTimeout(function () {{
            warningBanner.removeChild(div);
            updateBannerVisibility();
          }}, 5000);
        }}
        updateBannerVisibility();
      }}

      var loaderUrl = {loader_url};
      var config = {{
        arguments: [],
        dataUrl: {data_url},
        frameworkUrl: {framework_url},
        codeUrl: {code_url},
        streamingAssetsUrl: "StreamingAssets",
        companyName: {company},
        productName: {product},
        productVersion: {version},
        showBanner: unityShowBanner,
      }};

      // Force mobile style for all devices since this is portrait-only
      document.querySelector("#unity-container").className = "unity-mobile";
      canvas.className = "unity-mobile";

      // Responsive scaling function
      function resizeCanvas() {{
        const container = document.querySelector("#unity-container");
        const canvas = document.querySelector("#unity-canvas");

        // Get viewport dimensions
        const viewportWidth = window.innerWidth;
        const viewportHeight = window.innerHeight;

        // Calculate aspect ratio ({width}:{height} = {aspect:.3f})
        const targetAspectRatio = {width} / {height};
        const viewportAspectRatio = viewportWidth / viewportHeight;

        let canvasWidth, canvasHeight;

        if (viewportAspectRatio > targetAspectRatio) {{
          // Viewport is wider than target, fit to height
          canvasHeight = viewportHeight;
          canvasWidth = canvasHeight * targetAspectRatio;
        }} else {{
          // Viewport is taller than target, fit to width
          canvasWidth = viewportWidth;
          canvasHeight = canvasWidth / targetAspectRatio;
        }}

        // Apply dimensions
        canvas.style.width = canvasWidth + "px";
        canvas.style.height = canvasHeight + "px";

        // Center the canvas
        container.style.left = "50%";
        container.style.top = "50%";
        container.style.transform = "translate(-50%, -50%)";
      }}

      // Initial resize
      resizeCanvas();

      // Resize on window resize
      window.addEventListener("resize", resizeCanvas);

      document.querySelector("#unity-loading-bar").style.display = "block";

      var script = document.createElement("script");
      script.src = loaderUrl;
      script.onload = () => {{
        createUnityInstance(canvas, config, (progress) => {{
          document.querySelector("#unity-progress-bar-full").style.width =
            100 * progress + "%";
        }})
          .then((unityInstance) => {{
            document.querySelector("#unity-loading-bar").style.display = "none";
          }})
          .catch((message) => {{
            alert(message);
          }});
      }};

      document.body.appendChild(script);
    </script>
  </body>
</html>"""

TEMPLATE_CSS = """body {
  padding: 0;
  margin: 0;
  background: #ffffff;
  overflow: hidden;
}

#unity-container {
  position: fixed;
  width: 100%;
  height: 100%;
  display: flex;
  justify-content: center;
  align-items: center;
}

#unity-canvas {
  background: #ffffff;
  max-width: 100%;
  max-height: 100%;
  object-fit: contain;
}

#unity-loading-bar {
  position: absolute;
  left: 50%;
  top: 50%;
  transform: translate(-50%, -50%);
  display: none;
  z-index: 1000;
}

#unity-logo {
  width: 154px;
  height: 130px;
  background: url("unity-logo-light.png") no-repeat center;
  margin: 0 auto;
}

#unity-progress-bar-empty {
  width: 141px;
  height: 18px;
  margin-top: 10px;
  margin-left: 6.5px;
  background: url("progress-bar-empty-light.png") no-repeat center;
}

#unity-progress-bar-full {
  width: 0%;
  height: 18px;
  margin-top: 10px;
  background: url("progress-bar-full-light.png") no-repeat center;
}

#unity-warning {
  position: absolute;
  left: 50%;
  top: 5%;
  transform: translate(-50%);
  background: white;
  padding: 10px;
  display: none;
  z-index: 1001;
  border-radius: 5px;
  box-shadow: 0 2px 10px rgba(0, 0, 0, 0.3);
}"""
