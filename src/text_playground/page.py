from textwrap import dedent

# Single page UI. Every button posts the textarea to /transform/<operation>
# and renders the returned title and content into the result panel.
INDEX_HTML: str = dedent("""\
    <!DOCTYPE html>
    <html lang="en">
    <head>
      <meta charset="utf-8">
      <meta name="viewport" content="width=device-width, initial-scale=1">
      <title>Text Playground</title>
      <style>
        body { font-family: sans-serif; max-width: 40rem; margin: 2rem auto; }
        textarea { width: 100%; min-height: 8rem; }
        .buttons { display: flex; gap: 0.5rem; margin: 1rem 0; }
        #result { display: none; border: 1px solid #ccc; padding: 1rem; }
        #result.show { display: block; }
        #resultContent { white-space: pre-wrap; }
      </style>
    </head>
    <body>
      <h1>Text Playground</h1>
      <textarea id="textInput" placeholder="Type or paste some text..."></textarea>
      <div class="buttons">
        <button id="uppercaseBtn" data-operation="uppercase">Uppercase</button>
        <button id="lowercaseBtn" data-operation="lowercase">Lowercase</button>
        <button id="titleCaseBtn" data-operation="titlecase">Title Case</button>
        <button id="countBtn" data-operation="count">Count Letters</button>
      </div>
      <div id="result">
        <h2 id="resultTitle"></h2>
        <p id="resultContent"></p>
      </div>
      <script>
        function displayResult(title, content) {
          document.getElementById("resultTitle").textContent = title;
          document.getElementById("resultContent").textContent = content;
          document.getElementById("result").classList.add("show");
        }

        async function runOperation(operation) {
          const text = document.getElementById("textInput").value;
          const response = await fetch(`/transform/${operation}`, {
            method: "POST",
            headers: { "Content-Type": "application/json" },
            body: JSON.stringify({ text }),
          });
          if (!response.ok) {
            displayResult("Error", `Request failed (${response.status})`);
            return;
          }
          const result = await response.json();
          displayResult(result.title, result.content);
        }

        document.querySelectorAll("button[data-operation]").forEach((button) => {
          button.addEventListener("click", () => runOperation(button.dataset.operation));
        });
      </script>
    </body>
    </html>
""")
